from orphanage_form.presentation.messages import CATALOGS, DEFAULT_LOCALE, get_catalog


class TestMessageCatalog:
    def test_known_locale(self) -> None:
        assert get_catalog("en") is CATALOGS["en"]

    def test_unknown_locale_falls_back(self) -> None:
        assert get_catalog("fr") is CATALOGS[DEFAULT_LOCALE]

    def test_duplicate_name_interpolates_name(self) -> None:
        body = CATALOGS["pt_BR"].format_duplicate_name("Lar Esperança")
        assert body == "Já existe um cadastro com o nome: Lar Esperança"

    def test_limits_are_interpolated(self) -> None:
        catalog = CATALOGS["pt_BR"]
        assert catalog.format_description_too_long(300).endswith("até 300 caracteres")
        assert catalog.format_attachments_too_many(5) == "Adicione até 5 fotos"

    def test_every_locale_has_same_placeholders(self) -> None:
        for catalog in CATALOGS.values():
            assert "{name}" in catalog.duplicate_name_body
            assert "{max_length}" in catalog.description_too_long
            assert "{max_attachments}" in catalog.attachments_too_many

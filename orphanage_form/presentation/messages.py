"""Localized texts shown by the creation form."""

from dataclasses import dataclass

from orphanage_form.logging.logger import Log

DEFAULT_LOCALE = "pt_BR"


@dataclass(frozen=True)
class MessageCatalog:
    required: str
    description_too_long: str
    location_missing: str
    attachments_missing: str
    attachments_too_many: str
    success_title: str
    success_body: str
    success_confirm: str
    failure_title: str
    duplicate_name_body: str
    unknown_error_body: str
    failure_confirm: str

    def format_description_too_long(self, max_length: int) -> str:
        return self.description_too_long.format(max_length=max_length)

    def format_attachments_too_many(self, max_attachments: int) -> str:
        return self.attachments_too_many.format(max_attachments=max_attachments)

    def format_duplicate_name(self, name: str) -> str:
        return self.duplicate_name_body.format(name=name)


CATALOGS: dict[str, MessageCatalog] = {
    "pt_BR": MessageCatalog(
        required="Campo obrigatório",
        description_too_long=(
            "Descrição muito longa, informe até {max_length} caracteres"
        ),
        location_missing="Informe a localização no mapa",
        attachments_missing="Envie pelo menos uma foto",
        attachments_too_many="Adicione até {max_attachments} fotos",
        success_title="Uhull!",
        success_body="Orfanato cadastrado com sucesso.",
        success_confirm="Ok",
        failure_title="Oops!",
        duplicate_name_body="Já existe um cadastro com o nome: {name}",
        unknown_error_body="Ocorreu um erro desconhecido.",
        failure_confirm="Voltar",
    ),
    "en": MessageCatalog(
        required="Required field",
        description_too_long=(
            "Description too long, use at most {max_length} characters"
        ),
        location_missing="Pick the location on the map",
        attachments_missing="Send at least one photo",
        attachments_too_many="Add at most {max_attachments} photos",
        success_title="Hooray!",
        success_body="Orphanage registered successfully.",
        success_confirm="Ok",
        failure_title="Oops!",
        duplicate_name_body="An orphanage named {name} is already registered",
        unknown_error_body="An unknown error occurred.",
        failure_confirm="Back",
    ),
}


def get_catalog(locale: str) -> MessageCatalog:
    """Return the catalog for a locale, falling back to the default one."""
    catalog = CATALOGS.get(locale)
    if catalog is None:
        Log.warning(f"Unknown locale '{locale}', falling back to {DEFAULT_LOCALE}")
        return CATALOGS[DEFAULT_LOCALE]
    return catalog

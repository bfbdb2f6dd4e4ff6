import uuid

from orphanage_form.logging.logger import Log


class PreviewRegistry:
    """Hands out ephemeral preview references and tracks which are still live."""

    SCHEME = "blob:"

    def __init__(self, origin: str = "orphanage-form") -> None:
        self._origin = origin
        self._live: dict[str, bytes] = {}

    def acquire(self, content: bytes) -> str:
        """Register content and return a reference usable to render it."""
        url = f"{self.SCHEME}{self._origin}/{uuid.uuid4()}"
        self._live[url] = content
        return url

    def release(self, url: str) -> None:
        """Forget a reference. Releasing an unknown reference is a no-op."""
        if self._live.pop(url, None) is None:
            Log.debug(f"Preview {url} was already released")

    def resolve(self, url: str) -> bytes | None:
        return self._live.get(url)

    def is_live(self, url: str) -> bool:
        return url in self._live

    @property
    def live_count(self) -> int:
        return len(self._live)

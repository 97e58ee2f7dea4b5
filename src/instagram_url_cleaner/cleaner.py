from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional
from urllib.parse import SplitResult, urlsplit


INSTAGRAM_HOSTS = frozenset(
    {
        "instagram.com",
        "www.instagram.com",
        "m.instagram.com",
        "instagr.am",
        "www.instagr.am",
    }
)

TRACKING_MARKER = "/?"
NOTHING_REMOVED = "No tracking parameters found"
ALREADY_CLEAN = "URL was already clean"

EXAMPLE_URLS = (
    "https://www.instagram.com/reel/DMaaOuDK_Bk/?igsh=dHFkZW9ycmh1cnQz",
    "https://www.instagram.com/p/ABC123/?utm_source=ig_web_copy_link",
    "https://instagram.com/stories/username/123456789/?utm_medium=share_sheet",
)


class UrlCleanerError(ValueError):
    message = "Invalid URL"

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or self.message)


class InvalidDomainError(UrlCleanerError):
    message = "Please enter a valid Instagram URL (e.g., https://www.instagram.com/...)"


class ParseError(UrlCleanerError):
    message = "Failed to parse URL"


class MalformedUrlError(UrlCleanerError):
    message = "Invalid URL format. Please check your Instagram URL and try again."


@dataclass(slots=True, frozen=True)
class CleaningResult:
    clean_url: str
    removed: str
    was_modified: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse(url: str) -> SplitResult:
    """Parsea una URL absoluta o lanza ParseError."""
    if not isinstance(url, str):
        raise ParseError(f"Se esperaba str, se recibió {type(url).__name__}")
    try:
        parts = urlsplit(url)
        # .port valida el puerto; urlsplit solo falla con corchetes IPv6 rotos
        parts.port
    except ValueError as e:
        raise ParseError(str(e)) from e
    if not parts.scheme or not parts.netloc:
        raise ParseError(f"URL no absoluta: {url!r}")
    return parts


def is_valid_instagram_url(candidate: str) -> bool:
    """Indica si `candidate` es una URL absoluta con host de Instagram permitido."""
    try:
        parts = _parse(candidate)
    except ParseError:
        return False
    return (parts.hostname or "").lower() in INSTAGRAM_HOSTS


def clean_instagram_url(url: str) -> CleaningResult:
    """Elimina todo lo que sigue al primer `/?` de la URL.

    El host se reescribe en minúsculas y se descartan query, fragmento,
    puerto y credenciales:
    - https://www.instagram.com/reel/<id>/?igsh=... -> https://www.instagram.com/reel/<id>
    - https://instagram.com/p/<id> -> sin cambios

    Lo eliminado se calcula sobre el texto original, no sobre la URL parseada.
    """
    parts = _parse(url)

    # urlsplit ya separó la query: el "/?" solo puede quedar en la unión ruta/query
    clean_path = parts.path
    if parts.query and clean_path.endswith("/"):
        clean_path = clean_path[:-1]
    clean_url = f"{parts.scheme}://{(parts.hostname or '').lower()}{clean_path}"

    _, marker, tracking = url.partition(TRACKING_MARKER)
    if marker and tracking:
        return CleaningResult(clean_url, f"{TRACKING_MARKER}{tracking}", True)
    return CleaningResult(clean_url, NOTHING_REMOVED, False)


def validate_and_clean_url(raw_input: str) -> Optional[CleaningResult]:
    """Valida y limpia lo que escribió el usuario.

    Devuelve None si la entrada está vacía, lanza InvalidDomainError si no es
    una URL de Instagram y MalformedUrlError si no se pudo limpiar.
    """
    url = (raw_input or "").strip()
    if not url:
        return None

    if not is_valid_instagram_url(url):
        raise InvalidDomainError()

    try:
        return clean_instagram_url(url)
    except ParseError as e:
        raise MalformedUrlError() from e


def describe_removed(result: CleaningResult) -> str:
    if result.was_modified:
        return result.removed
    return ALREADY_CLEAN

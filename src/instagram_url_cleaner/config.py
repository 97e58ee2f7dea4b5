import os
from dataclasses import dataclass

from dotenv import load_dotenv


OUTPUT_FORMATS = ("text", "json")


@dataclass(slots=True)
class Config:
    log_level: str = "INFO"
    # text | json
    output_format: str = "text"


def load_config() -> Config:
    """Carga variables de entorno desde .env y devuelve la Config."""
    load_dotenv()
    output_format = os.getenv("OUTPUT_FORMAT", "text").strip().lower()
    if output_format not in OUTPUT_FORMATS:
        output_format = "text"
    return Config(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        output_format=output_format,
    )

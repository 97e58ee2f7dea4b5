from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .config import load_config
from .cleaner import (
    EXAMPLE_URLS,
    UrlCleanerError,
    describe_removed,
    is_valid_instagram_url,
    validate_and_clean_url,
)


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Limpia parámetros de rastreo de enlaces de Instagram")
    subparsers = parser.add_subparsers(dest="command", required=True)

    clean_parser = subparsers.add_parser("clean", help="Limpiar una o más URLs (o leerlas de stdin)")
    clean_parser.add_argument("urls", nargs="*", help="URLs de Instagram; sin argumentos se lee una por línea de stdin")
    clean_parser.add_argument("--json", action="store_true", help="Imprimir el resultado en JSON")
    clean_parser.add_argument("--output", type=Path, default=None, help="Archivo de salida (opcional)")

    check_parser = subparsers.add_parser("check", help="Comprobar si una URL es de Instagram")
    check_parser.add_argument("url", help="URL a comprobar")

    subparsers.add_parser("examples", help="Limpiar las URLs de ejemplo")

    return parser


def clean_all(inputs: Iterable[str]) -> List[Dict[str, Any]]:
    """Limpia cada entrada; las vacías se ignoran y los errores quedan en el item."""
    items: List[Dict[str, Any]] = []
    for raw in inputs:
        try:
            result = validate_and_clean_url(raw)
        except UrlCleanerError as e:
            logger.debug("Entrada rechazada %r: %s", raw, e)
            items.append({"input": raw.strip(), "error": e.message})
            continue
        if result is None:
            continue
        logger.debug("%r -> %s", raw, result.clean_url)
        items.append({"input": raw.strip(), **result.to_dict(), "description": describe_removed(result)})
    return items


def render_text(items: List[Dict[str, Any]]) -> str:
    lines: List[str] = []
    for it in items:
        lines.append(it["clean_url"])
        lines.append(f"  {it['description']}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config()
    logging.basicConfig(level=getattr(logging, config.log_level.upper(), logging.INFO), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "check":
        valid = is_valid_instagram_url(args.url.strip())
        print("valid" if valid else "invalid")
        return 0 if valid else 1

    as_json = config.output_format == "json"
    out_path = None
    if args.command == "examples":
        inputs: Iterable[str] = EXAMPLE_URLS
    elif args.command == "clean":
        inputs = args.urls if args.urls else sys.stdin.read().splitlines()
        as_json = as_json or args.json
        out_path = args.output
    else:
        parser.error("Comando no reconocido")
        return 2

    items = clean_all(inputs)
    cleaned = [it for it in items if "error" not in it]
    errors = [it for it in items if "error" in it]
    logger.info("URLs limpiadas: %d, rechazadas: %d", len(cleaned), len(errors))

    if as_json:
        output = json.dumps(items, ensure_ascii=False, indent=2)
    else:
        output = render_text(cleaned)
        for it in errors:
            print(f"{it['input']}: {it['error']}", file=sys.stderr)
    if output:
        print(output)

    if out_path:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output + "\n", encoding="utf-8")
        logger.info("Resultado guardado en %s", out_path)

    return 1 if errors else 0

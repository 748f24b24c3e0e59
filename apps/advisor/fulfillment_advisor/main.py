from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import get_settings
from .schemas import SurveyResponse
from .services.engine import generate_result

logger = logging.getLogger("fulfillment_advisor")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fulfillment-advisor",
        description="Recommend a fulfilment strategy from survey answers (JSON).",
    )
    parser.add_argument("answers", nargs="?", default="-", help="Path to a JSON file of survey answers, or - for stdin")
    parser.add_argument("--json", action="store_true", help="Print the full structured result instead of the document")
    return parser.parse_args(argv)


def _read_answers(source: str) -> dict:
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise ValueError("survey answers must be a JSON object")
    return payload


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    args = _parse_args(argv)

    try:
        survey = SurveyResponse.model_validate(_read_answers(args.answers))
    except OSError as exc:
        logger.error("cannot read survey answers: %s", exc)
        return 2
    except ValidationError as exc:
        logger.error("survey answers are incomplete: %s", exc)
        return 2
    except ValueError as exc:
        logger.error("survey answers are not valid JSON: %s", exc)
        return 2

    result = generate_result(survey, settings=settings)
    logger.info("recommended %s for %s", result.strategy.value, result.content.first_name)

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(result.rendered_document, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())

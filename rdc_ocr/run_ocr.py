"""
run_ocr.py

Command-line entry point: extract a document record from an image, or
from a text file that has already been through OCR.

Usage:
    rdc-ocr <image_path> --type passport
    rdc-ocr <image_path> --type vehicle --json
    rdc-ocr <text_path> --type voter_card --text
"""

import argparse
import logging
import os
import sys

from . import config
from .engine import RecognitionError
from .pipeline import DocumentKind, extract_from_text, process_document
from .schemas import RecognizedText


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract structured data from Congolese identity and vehicle documents"
    )
    parser.add_argument(
        "path",
        help="Path to the image (or text file with --text) to process",
    )
    parser.add_argument(
        "--type",
        dest="kind",
        required=True,
        help="Document type: vehicle, passport, id_card, voter_card (or V, P, I, E)",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Treat the input as already recognized UTF-8 text",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the record as JSON",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not os.path.exists(args.path):
        print(f"Error: File not found: {args.path}", file=sys.stderr)
        return 1

    try:
        kind = DocumentKind.from_code(args.kind)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if args.text:
            with open(args.path, "r", encoding="utf-8") as f:
                recognized = RecognizedText(text=f.read().strip(), confidence=100.0)
            record = extract_from_text(recognized, kind)
        else:
            with open(args.path, "rb") as f:
                record = process_document(f.read(), kind)
    except RecognitionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(record.model_dump_json(by_alias=True, indent=2))
        return 0

    print(f"Document: {record.document_type}")
    print(f"Confidence: {record.confidence:.2f}%")
    print("---")
    for name, value in record.model_dump(by_alias=True, exclude={'raw_text', 'confidence', 'document_type'}).items():
        print(f"{name}: {value if value is not None else '-'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Seed script to populate the contact directory via API endpoints.

Run:
    python seed/seed_contacts.py \
      --api-id <API-ID> \
      [--photos-dir <DIR>]

Contacts come from seed/data/contacts.json. When a photos directory is given,
any entry with a `photo` field gets that file attached after creation.
"""

import argparse
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")


API_BASE_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed contacts via Contact Directory API")

    parser.add_argument(
        "--api-id",
        required=True,
        help="Base API ID (e.g. LocalStack API Gateway ID)",
    )
    parser.add_argument(
        "--photos-dir",
        type=Path,
        default=None,
        help="Directory holding photo files referenced by the seed data",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Number of contacts to seed",
    )

    return parser.parse_args()


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "contacts.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def attach_photo(base_url: str, contact_id: str, photo_path: Path) -> None:
    if not photo_path.exists():
        logger.warning("Photo file not found", extra={"path": str(photo_path)})
        return

    with open(photo_path, "rb") as f:
        response = requests.put(
            f"{base_url}/contacts/photo",
            data={"id": contact_id},
            files={"file": (photo_path.name, f, "application/octet-stream")},
            timeout=30,
        )

    if response.ok:
        logger.info("Attached photo", extra={"contact_id": contact_id, "photo_url": response.text})
    else:
        logger.error(
            "Failed to attach photo",
            extra={"contact_id": contact_id, "status": response.status_code, "response": response.text},
        )


def seed_contacts() -> None:
    try:
        args = parse_args()
        data = load_sample_data()

        base_url = API_BASE_URL.format(args.api_id)

        logger.info("Starting seeding process", extra={"api_base_url": base_url})

        for item in cast(list[dict[str, Any]], data.get("contacts", []))[: args.limit]:
            fields = {k: v for k, v in item.items() if k != "photo"}

            response = requests.post(f"{base_url}/contacts", json=fields, timeout=30)
            response_json = cast(dict[str, Any], response.json())

            if response.status_code != 201:
                logger.error(
                    "Failed to seed contact",
                    extra={"contact_name": item.get("name"), "status": response.status_code, "response": response_json},
                )
                continue

            contact_id = response_json["id"]
            logger.info("Seeded contact", extra={"contact_name": item.get("name"), "contact_id": contact_id})

            if args.photos_dir and item.get("photo"):
                attach_photo(base_url, contact_id, args.photos_dir / item["photo"])

        logger.info("Seeding completed")

        list_response = requests.get(f"{base_url}/contacts", params={"page": 0, "size": 10}, timeout=30)

        logger.info(
            "List contacts response",
            extra={
                "status": list_response.status_code,
                "response": list_response.json() if list_response.ok else list_response.text,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_contacts()

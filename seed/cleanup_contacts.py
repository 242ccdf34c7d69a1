#!/usr/bin/env python3
"""
Cleanup script to remove every contact via API endpoints.

Run:
    python seed/cleanup_contacts.py --api-id <API-ID>
"""

import argparse
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")

API_BASE_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_"
PAGE_SIZE = 100


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cleanup contacts via Contact Directory API")

    parser.add_argument(
        "--api-id",
        required=True,
        help="API Gateway ID (LocalStack)",
    )

    return parser.parse_args()


def collect_contact_ids(base_url: str) -> list[str]:
    ids: list[str] = []
    page = 0

    while True:
        response = requests.get(f"{base_url}/contacts", params={"page": page, "size": PAGE_SIZE}, timeout=30)
        response.raise_for_status()
        body = cast(dict[str, Any], response.json())

        ids.extend(c["id"] for c in body.get("contacts", []))

        if not body.get("pagination", {}).get("has_more"):
            return ids
        page += 1


def cleanup_contacts() -> None:
    try:
        args = parse_args()
        base_url = API_BASE_URL.format(args.api_id)

        logger.info("Starting cleanup process", extra={"api_base_url": base_url})

        # Collect first so deletes don't shift later pages.
        contact_ids = collect_contact_ids(base_url)
        deleted = 0

        for contact_id in contact_ids:
            response = requests.delete(f"{base_url}/contacts/{contact_id}", timeout=30)
            if response.ok:
                deleted += 1
            else:
                logger.error(
                    "Failed to delete contact",
                    extra={"contact_id": contact_id, "status": response.status_code},
                )

        logger.info("Cleanup completed", extra={"deleted": deleted, "found": len(contact_ids)})

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_contacts()

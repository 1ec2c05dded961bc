#!/usr/bin/env python3
"""
listverify.py — EmailListVerify command-line client

Features
- Single address verification
- Bulk CSV upload for asynchronous verification
- Status polling for uploaded files, with report links once finished
- API key loaded from .env

Environment (.env)
  EMAILLISTVERIFY_API_KEY=...

Usage
  # Single verification
  python listverify.py EMAIL [--timeout SECONDS]

  # Bulk upload
  python listverify.py --upload FILE.csv

  # Bulk status
  python listverify.py --status FILE_ID
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import click
from dotenv import load_dotenv

from emaillistverify.client import EmailListVerify
from emaillistverify.errors import EmailListVerifyError
from emaillistverify.models import SingleVerificationResult, VerificationStatus

# --------------------------
# Output
# --------------------------

RESULT_ICONS = {
    SingleVerificationResult.OK: "✅",
    SingleVerificationResult.FAIL: "🚫",
    SingleVerificationResult.UNKNOWN: "⚠️",
    SingleVerificationResult.INCORRECT: "❌",
}

RESULT_DETAILS = {
    SingleVerificationResult.OK: "Passed all verification tests.",
    SingleVerificationResult.FAIL: "Failed one or more verification tests.",
    SingleVerificationResult.UNKNOWN: "Could not be accurately tested.",
    SingleVerificationResult.INCORRECT: "Empty address or syntax error.",
}


def print_single_result(email: str, result: SingleVerificationResult) -> None:
    print("\n================ Email Check =================")
    print(f"📧 Email:           {email}")
    print(f"{RESULT_ICONS[result]} Result:          {result.value}")
    print(f"💡 Detail:          {RESULT_DETAILS[result]}")
    print("============================================\n")


def print_status(status: VerificationStatus) -> None:
    """Print a bulk job snapshot in a formatted way."""
    pct = status.percentage_completed
    progress = f"{pct:.1%}" if pct is not None else "-"

    print("\n================ File Status =================")
    print(f"🆔 File id:         {status.file_id}")
    print(f"📄 Filename:        {status.filename}")
    print(f"🧹 Unique:          {'yes' if status.unique else 'no'}")
    print(f"📊 Status:          {status.status.value}")
    print(f"⏳ Progress:        {status.lines_processed}/{status.total_lines} ({progress})")
    print(f"🕒 Uploaded:        {status.timestamp.isoformat()}")
    if status.is_finished:
        print(f"📥 All results:     {status.link_all or '-'}")
        print(f"📥 OK results:      {status.link_ok or '-'}")
    print("============================================\n")


def enable_debug_logging() -> None:
    """Turn on DEBUG for this package only; urllib3 logs full query strings."""
    logger = logging.getLogger("emaillistverify")
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(asctime)s %(name)s: %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)


# --------------------------
# CLI
# --------------------------


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("email", required=False)
@click.option(
    "--upload",
    "upload_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Upload a CSV file for bulk verification.",
)
@click.option("--status", "file_id", type=int, help="Check a bulk upload by file id.")
@click.option(
    "--timeout",
    default=30,
    show_default=True,
    help="Seconds the service may spend verifying a single address.",
)
@click.option(
    "--http-timeout",
    type=float,
    default=None,
    help="Local socket timeout in seconds (default: wait for the service).",
)
@click.option("--api-key", help="Overrides EMAILLISTVERIFY_API_KEY.")
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP requests.")
def main(
    email: Optional[str],
    upload_path: Optional[str],
    file_id: Optional[int],
    timeout: int,
    http_timeout: Optional[float],
    api_key: Optional[str],
    verbose: bool,
) -> None:
    load_dotenv()
    if verbose:
        enable_debug_logging()

    modes = [m for m in (email, upload_path, file_id) if m is not None]
    if len(modes) != 1:
        raise click.UsageError("Give exactly one of EMAIL, --upload or --status.")

    try:
        client = EmailListVerify(
            api_key or os.getenv("EMAILLISTVERIFY_API_KEY"),
            request_timeout=http_timeout,
        )

        if upload_path is not None:
            new_id = client.bulk_upload(upload_path)
            print(f"\n📤 Uploaded {os.path.basename(upload_path)} → file id {new_id}")
            print(f"   Check progress with: --status {new_id}\n")
            return

        if file_id is not None:
            print_status(client.check_status(file_id))
            return

        assert email is not None
        print_single_result(email, client.verify_single_email(email, timeout=timeout))

    except EmailListVerifyError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()

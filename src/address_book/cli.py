from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from address_book.models import AddressBookError, AddressBookValidationError
from address_book.remote import AddressLookupClient
from address_book.validation import SearchFieldsValidator, first_error_message

app = typer.Typer(help="Look up addresses by postcode and house number.")


def _make_client(base_url: Optional[str]) -> AddressLookupClient:
    return AddressLookupClient(base_url=base_url)


@app.callback()
def configure(
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Log lookup and normalization details to stderr.",
    ),
) -> None:
    """Address book command line tools."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@app.command()
def lookup(
    postcode: str = typer.Argument(..., help="Postcode to search."),  # noqa: B008
    house_number: str = typer.Argument(..., help="House number to search."),  # noqa: B008
    base_url: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--base-url",
        help="Lookup API base URL (defaults to ADDRESS_BOOK_API_URL).",
    ),
) -> None:
    """Print the candidate addresses for POSTCODE and HOUSE_NUMBER as JSON."""
    message = first_error_message(
        SearchFieldsValidator().validate({"postCode": postcode, "houseNumber": house_number})
    )
    if message is not None:
        typer.echo(message)
        raise typer.Exit(code=1)

    client = _make_client(base_url)
    try:
        result = client.find_addresses(postcode, house_number)
    except (AddressBookError, AddressBookValidationError) as exc:
        typer.echo(f"Lookup failed: {exc}")
        raise typer.Exit(code=1) from exc
    finally:
        client.close()

    typer.echo(json.dumps([address.to_dict() for address in result.addresses], indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Command line front end for the Product Inventory API.

Lists, shows, adds, edits and deletes products through
:class:`inventory_client.ProductCatalog`.  Searching and sorting are
done locally on the loaded list.

Usage:
    python inventory_cli.py list --search wid --sort price
    python inventory_cli.py add --name Widget --quantity 10 --price 2.50
    python inventory_cli.py edit 3 --name Widget --quantity 5 --price 2.50
    python inventory_cli.py delete 3 --yes

The API base URL is taken from --base-url or the INVENTORY_API_URL
environment variable (default http://localhost:8000).
"""

import argparse
import logging
import os
import sys

from inventory_client import SORT_KEYS, ProductAPI, ProductCatalog


def format_table(products, total_value=None):
    lines = [f"{'ID':>5}  {'Name':<30} {'Qty':>6} {'Price':>10} {'Value':>12}"]
    for p in products:
        value = p["quantity"] * p["price"]
        lines.append(
            f"{p['id']:>5}  {p['name'][:30]:<30} {p['quantity']:>6} {p['price']:>10.2f} {value:>12.2f}"
        )
    if total_value is not None:
        lines.append(f"{'':>5}  {'Total':<30} {'':>6} {'':>10} {total_value:>12.2f}")
    return "\n".join(lines)


def confirm(question):
    try:
        answer = input(f"{question} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def _payload(args):
    payload = {"name": args.name, "quantity": args.quantity, "price": args.price}
    if args.description is not None:
        payload["description"] = args.description
    return payload


def _add_product_fields(parser):
    parser.add_argument("--name", required=True)
    parser.add_argument("--quantity", type=int, required=True)
    parser.add_argument("--price", type=float, required=True)
    parser.add_argument("--description")


def build_parser():
    ap = argparse.ArgumentParser(description="Manage products in the inventory API.")
    ap.add_argument(
        "--base-url",
        default=os.getenv("INVENTORY_API_URL", "http://localhost:8000"),
        help="API base URL",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")
    sub = ap.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List products")
    list_cmd.add_argument("--search", default="", help="Case-insensitive name filter")
    list_cmd.add_argument("--sort", choices=SORT_KEYS, default="name")

    show_cmd = sub.add_parser("show", help="Show one product")
    show_cmd.add_argument("id", type=int)

    add_cmd = sub.add_parser("add", help="Create a product")
    _add_product_fields(add_cmd)

    edit_cmd = sub.add_parser("edit", help="Replace a product's fields")
    edit_cmd.add_argument("id", type=int)
    _add_product_fields(edit_cmd)

    delete_cmd = sub.add_parser("delete", help="Delete a product")
    delete_cmd.add_argument("id", type=int)
    delete_cmd.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    return ap


def main(argv=None, api=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.CRITICAL)
    catalog = ProductCatalog(api or ProductAPI(base_url=args.base_url))

    if args.command == "show":
        product, error = catalog.api.get_product(args.id)
        if error:
            print("[!] Failed to fetch product.", file=sys.stderr)
            return 1
        print(format_table([product]))
        return 0

    if args.command == "add":
        ok = catalog.add(_payload(args))
    elif args.command == "edit":
        ok = catalog.edit(args.id, _payload(args))
    elif args.command == "delete":
        if not args.yes and not confirm("Are you sure you want to delete this product?"):
            print("Delete cancelled")
            return 0
        ok = catalog.remove(args.id)
    else:
        ok = catalog.refresh()

    if not ok:
        print(f"[!] {catalog.error}", file=sys.stderr)
        return 1

    rows = catalog.visible(args.search, args.sort) if args.command == "list" else catalog.products
    if not rows:
        print("No products found")
    else:
        print(format_table(rows, catalog.total_value()))
    print(f"{catalog.count()} product(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())

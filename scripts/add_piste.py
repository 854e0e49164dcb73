#!/usr/bin/env python3
"""
Register a new piste directly in the database.

Usage:
  python scripts/add_piste.py --name "Blue Slope" --color BLUE [--length 1000] [--slope 15]
"""
from __future__ import annotations

import argparse
import sys

from skistation.db.create_tables import create_all
from skistation.db.models import Piste
from skistation.db.session import get_session
from skistation.domain.enums import Color
from skistation.services.piste_service import PisteService


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a piste")
    ap.add_argument("--name", required=True, help="Piste name (e.g. 'Blue Slope')")
    ap.add_argument("--color", required=True, choices=[c.value for c in Color], help="Difficulty color")
    ap.add_argument("--length", type=int, default=0, help="Length in meters")
    ap.add_argument("--slope", type=int, default=0, help="Slope in degrees")
    args = ap.parse_args()

    name = (args.name or "").strip()
    if not name:
        raise SystemExit("Invalid piste name")
    if args.length < 0 or args.slope < 0:
        raise SystemExit("Length and slope must be positive")

    create_all()
    with get_session() as session:
        piste = PisteService.from_session(session).add_piste(
            Piste(name_piste=name, color=Color(args.color), length=args.length, slope=args.slope)
        )
        print("OK: piste registered")
        print(f"  Id: {piste.num_piste}")
        print(f"  Name: {piste.name_piste}")
        print(f"  Color: {piste.color.value}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)

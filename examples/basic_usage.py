"""
Basic usage
===========

Shows the MikroID API:
- ad-hoc IDs with create()
- named profiles registered up front or with add()
- generating from a profile with custom()
- removing a profile with remove()

Run:
    python examples/basic_usage.py
"""

import logging

from mikroid import ConfigurationNotFoundError, IdStyle, MikroID


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    ids = MikroID(
        {
            "session": {"length": 24},
            "api-key": {"length": 32, "style": IdStyle.ALPHANUMERIC},
        }
    )

    print("=" * 60)
    print("  Ad-hoc IDs")
    print("=" * 60)
    print(f"  default       : {ids.create()}")
    print(f"  8 chars       : {ids.create(8)}")
    print(f"  hex           : {ids.create(16, 'hex')}")
    print(f"  lowercase hex : {ids.create(16, 'hex', True)}")
    print(f"  not URL-safe  : {ids.create(16, 'extended', False, False)}")

    ids.add({"name": "record", "length": 12, "only_lower_case": True})

    print("\n" + "=" * 60)
    print("  Named profiles")
    print("=" * 60)
    for name in ids.names():
        print(f"  {name:<8}: {ids.custom(name)}")

    ids.remove({"name": "record"})
    try:
        ids.custom("record")
    except ConfigurationNotFoundError as exc:
        print(f"\n  after remove: {exc}")


if __name__ == "__main__":
    main()

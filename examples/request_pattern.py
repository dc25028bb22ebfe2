"""Example script that asks the server for a crossed pentagon pattern."""
from __future__ import annotations

import requests

BASE_URL = "http://localhost:8000"


def main() -> None:
    payload = {"sides": 5, "crossed": True, "density": 30, "color": [0.1, 0.2, 0.6]}
    res = requests.post(f"{BASE_URL}/api/pattern", json=payload, timeout=5)
    res.raise_for_status()
    print(res.json())

    res = requests.get(f"{BASE_URL}/api/pattern.svg", timeout=5)
    res.raise_for_status()
    with open("pentagon.svg", "w", encoding="utf-8") as fh:
        fh.write(res.text)
    print("Saved: pentagon.svg")


if __name__ == "__main__":
    main()

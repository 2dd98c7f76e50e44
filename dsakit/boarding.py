"""Passenger boarding list kept in group order: A first, then B, then C."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Passenger:
    """A passenger with an identifier, a name and a boarding group letter."""

    id: int
    name: str
    group: str

    def __str__(self) -> str:
        return f"{self.id} {self.name} {self.group}"


class BoardingList:
    """Passengers ordered by boarding group as they arrive.

    Group A joins at the front, group C at the back, and any other group
    joins right after the group A block, ahead of earlier arrivals.
    """

    def __init__(self, passengers: Iterable[Passenger] = ()) -> None:
        self._passengers: list[Passenger] = []
        for passenger in passengers:
            self.add(passenger)

    def __iter__(self) -> Iterator[Passenger]:
        return iter(list(self._passengers))

    def __len__(self) -> int:
        return len(self._passengers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._passengers!r})"

    def add(self, passenger: Passenger) -> None:
        """Place ``passenger`` according to its boarding group."""
        if passenger.group == "A":
            self._passengers.insert(0, passenger)
        elif passenger.group == "C":
            self._passengers.append(passenger)
        else:
            index = next(
                (i for i, p in enumerate(self._passengers) if p.group != "A"),
                len(self._passengers),
            )
            self._passengers.insert(index, passenger)

    def format(self) -> str:
        """Render as ``id name group -> ... -> NULL``."""
        return "".join(f"{p} -> " for p in self._passengers) + "NULL"


def _default_list() -> BoardingList:
    return BoardingList(
        [
            Passenger(10, "ankit", "A"),
            Passenger(20, "varun", "B"),
            Passenger(30, "sameer", "C"),
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Show the sample list, add one passenger and show the result."""
    parser = argparse.ArgumentParser(description="Add a passenger to the boarding list.")
    parser.add_argument("--group", help="boarding group letter")
    parser.add_argument("--id", type=int, dest="passenger_id", help="passenger ID")
    parser.add_argument("--name", help="passenger name")
    args = parser.parse_args(argv)

    boarding = _default_list()
    print("\nPrinting Original Linked List.........")
    print(boarding.format())

    group = args.group if args.group is not None else input("\nenter the group: ").strip()
    passenger_id = args.passenger_id
    if passenger_id is None:
        raw = input("\nenter the ID: ").strip()
        try:
            passenger_id = int(raw)
        except ValueError:
            print(f"invalid ID: {raw!r}")
            return 1
    name = args.name if args.name is not None else input("\nenter the name: ").strip()
    if not group:
        print("a group is required")
        return 1

    boarding.add(Passenger(passenger_id, name, group[0]))
    print("\nPrinting Updated Linked List.........")
    print(boarding.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
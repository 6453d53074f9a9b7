"""Command line entry point: classify a Platonic solid from its {p, q} symbol."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class Classification:
    """The base solid to build, its symbol, and whether the dual is wanted."""

    name: str
    p: int
    q: int
    dual: bool


_TRIANGULAR = {3: "Tetraedro", 4: "Ottaedro", 5: "Icosaedro"}
_DUALS = {(4, 3): "Ottaedro", (5, 3): "Icosaedro"}


def classify_polyhedron(p: int, q: int) -> Classification:
    """Classify ``{p, q}``.

    The cube and the dodecahedron are reported through their duals, with
    ``p`` and ``q`` swapped and ``dual`` set.
    """
    if p == 3:
        if q in _TRIANGULAR:
            return Classification(_TRIANGULAR[q], p, q, False)
    elif (p, q) in _DUALS:
        return Classification(_DUALS[p, q], q, p, True)
    raise ValueError(f"{{{p}, {q}}} is not a Platonic solid")


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' is not an integer") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"'{text}' is negative")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="polyhedra", description=__doc__)
    parser.add_argument("p", type=_non_negative, help="vertices of each face")
    parser.add_argument("q", type=_non_negative, help="faces meeting at each vertex")
    parser.add_argument("b", type=_non_negative, nargs="?", default=0, help="first subdivision parameter")
    parser.add_argument("c", type=_non_negative, nargs="?", default=0, help="second subdivision parameter")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the classification of the solid given on the command line."""
    args = _parser().parse_args(argv)
    try:
        result = classify_polyhedron(args.p, args.q)
    except ValueError:
        print("Poliedro: Errore")
        print("Duale: 0")
        return 1
    print(f"Poliedro: {result.name}")
    print(f"Duale: {int(result.dual)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Evaluate a single octonion operation from the command line.

Example:
    octo mul 1,2,3,4,5,6,7,8 0,1,0,0,0,0,0,0
    octo --klein inv -- -1,0,0,0,0,0,0,0
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from collections.abc import Sequence

from octo.algebra import Cayley
from octo.algebra import Klein
from octo.algebra import ZeroDivisorError
from octo.logger import setup_logging
from octo.render import format_real

logger = logging.getLogger(__name__)

# Operation name -> (arity, evaluator returning printable text)
OPERATIONS: dict[str, tuple[int, Callable[..., str]]] = {
    "add": (2, lambda x, y: str(x + y)),
    "sub": (2, lambda x, y: str(x - y)),
    "mul": (2, lambda x, y: str(x * y)),
    "quo": (2, lambda x, y: str(x / y)),
    "comm": (2, lambda x, y: str(x.commutator(y))),
    "assoc": (3, lambda w, x, y: str(w.associator(x, y))),
    "inv": (1, lambda x: str(x.inverse())),
    "conj": (1, lambda x: str(x.conjugate())),
    "neg": (1, lambda x: str(-x)),
    "quad": (1, lambda x: format_real(x.quadrance())),
    "sph": (1, lambda x: " ".join(format_real(c) for c in x.to_hyperspherical())),
}


def parse_operand(text: str) -> tuple[float, ...]:
    """Parse eight comma-separated reals."""
    try:
        values = tuple(float(part) for part in text.split(","))
    except ValueError as e:
        msg = f"Operand must be 8 comma-separated reals; got {text!r}."
        raise argparse.ArgumentTypeError(msg) from e
    if len(values) != 8:
        msg = f"Operand must have 8 components; got {len(values)} in {text!r}."
        raise argparse.ArgumentTypeError(msg)
    return values


def evaluate(operation: str, operands: Sequence[Sequence[float]], klein: bool = False) -> str:
    """Apply `operation` to the operands and return the printable result."""
    arity, func = OPERATIONS[operation]
    if len(operands) != arity:
        error_message = f"Operation {operation!r} takes {arity} operand(s); got {len(operands)}."
        raise ValueError(error_message)
    cls = Klein if klein else Cayley
    values = [cls(*operand) for operand in operands]
    logger.debug("Evaluating %s on %s", operation, ", ".join(map(repr, values)))
    return func(*values)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="octo",
        description="Evaluate Cayley or Klein octonion arithmetic.",
        epilog="Place '--' before operands that start with a minus sign.",
    )
    p.add_argument("operation", choices=sorted(OPERATIONS))
    p.add_argument(
        "operands",
        nargs="+",
        type=parse_operand,
        metavar="X",
        help="Eight comma-separated reals, e.g. 1,0,0,0,0,0,0,0.",
    )
    p.add_argument("--klein", action="store_true", help="Use split (Klein) octonions.")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    setup_logging(args.log_level)

    arity, _ = OPERATIONS[args.operation]
    if len(args.operands) != arity:
        p.error(f"{args.operation} takes {arity} operand(s); got {len(args.operands)}")

    try:
        result = evaluate(args.operation, args.operands, klein=args.klein)
    except ZeroDivisorError:
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
CLI entry point. Run as: python -m curry [--load NAME | --new NAME]
"""

import argparse
import sys

from .core.errors import ProofError
from .session import proof_path, record_proof, replay_proof


def stdin_lines():
    """Lines typed at the terminal, until end of input."""
    while True:
        try:
            yield input()
        except EOFError:
            return


def ask_mode():
    """The original two questions: load or create, and under what name."""
    print("Would you like to load the proof from a file? [y/n]")
    answer = input().strip()
    if answer == "y":
        print("Please specify the name of the file that contains the proof:")
        return "load", input().strip()
    if answer == "n":
        print("Please specify the name of the file that will store the proof:")
        return "new", input().strip()
    raise ValueError(f"Invalid answer: {answer!r}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="curry",
        description="Interactive prover for intuitionistic propositional logic",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--load", type=str, default=None, metavar="NAME",
                      help="Replay the proof stored in NAME.proof")
    mode.add_argument("--new", type=str, default=None, metavar="NAME",
                      help="Prove interactively, recording to NAME.proof")
    parser.add_argument("--unicode", action="store_true",
                        help="Display connectives as Unicode symbols")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    args = parser.parse_args(argv)

    try:
        if args.load:
            kind, name = "load", args.load
        elif args.new:
            kind, name = "new", args.new
        else:
            try:
                kind, name = ask_mode()
            except ValueError as e:
                print(e, file=sys.stderr)
                return 2
            except EOFError:
                print("No answer given.", file=sys.stderr)
                return 2

        if kind == "load":
            proof = replay_proof(name, verbose=not args.quiet, unicode=args.unicode)
        else:
            proof = record_proof(name, stdin_lines(),
                                 verbose=not args.quiet, unicode=args.unicode)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except OSError as e:
        print(f"Error: cannot open {proof_path(name)}: {e.strerror}", file=sys.stderr)
        return 1
    except ProofError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    if args.quiet:
        print(proof)
    return 0


if __name__ == "__main__":
    sys.exit(main())

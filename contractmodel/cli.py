"""
Contract Model CLI - Command-line interface for the test generator.

Usage:
    contractmodel sample [--seed N] [--size N]    Generate an action sequence
    contractmodel shrink [--seed N] [--size N]    Generate a sequence and show its shrinks
    contractmodel validate [--seed N] [--size N]  Generate a sequence and replay it

All commands use the bundled vault model.
"""

import argparse
import random
import sys

from .log import configure_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Contract Model - model-based test generation for contracts",
        prog="contractmodel",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    for name, help_text in [
        ("sample", "Generate an action sequence"),
        ("shrink", "Generate a sequence and list its shrink candidates"),
        ("validate", "Generate a sequence and replay it from the initial state"),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--seed", type=int, default=None, help="Random seed")
        sub.add_argument("--size", type=int, default=None, help="Number of steps")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "sample":
        cmd_sample(args)
    elif args.command == "shrink":
        cmd_shrink(args)
    elif args.command == "validate":
        cmd_validate(args)
    else:
        parser.print_help()
        sys.exit(1)


def _generate(args):
    from .core import generate_actions
    from .models.vault import VaultModel

    model = VaultModel()
    actions = generate_actions(model, random.Random(args.seed), args.size)
    return model, actions


def cmd_sample(args):
    """Generate and print a sequence."""
    model, actions = _generate(args)
    print(f"Model: {model.get_name()}")
    print(actions)
    if actions.rejected:
        print(f"\nRejected during generation: {len(actions.rejected)}")
        for name in sorted(set(actions.rejected)):
            print(f"  - {name}: {actions.rejected.count(name)}")


def cmd_shrink(args):
    """Generate a sequence and print its first-level shrinks."""
    from .core import shrink_actions

    model, actions = _generate(args)
    print(actions)
    candidates = shrink_actions(model, actions)
    print(f"\nShrink candidates: {len(candidates)}")
    if candidates:
        print("First candidate:")
        print(candidates[0])


def cmd_validate(args):
    """Generate a sequence, replay it and print the final model state."""
    from .core import PreconditionViolation, validate_actions

    model, actions = _generate(args)
    try:
        state = validate_actions(model, actions)
    except PreconditionViolation as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Steps: {len(actions)}")
    print(f"Final slot: {state.current_slot}")
    print(f"Tokens: {len(state.sym_tokens)}")
    print(f"Assertions ok: {state.assertions_ok}")
    for wallet in sorted(state.balance_changes):
        print(f"  {wallet}: {state.balance_change(wallet)}")


if __name__ == "__main__":
    main()

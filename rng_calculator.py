#!/usr/bin/env python3
"""
Fish It (Roblox) RNG Calculator

Calculates the chance of catching a rare fish based on:
1. Base rate 1 : X (the game's odds before modifiers)
2. Total Luck % (100% luck = 2x the base chance)
3. Total Caught (casts made so far)

Shows the per-cast chance, the chance of at least one drop over the casts
made, a community "respawn after" suggestion, and advisory next steps.
The model is fan-made; the game developer does not publish the formula.
"""

from __future__ import annotations

import argparse
import sys

from rngcalc.cli.session import CalculatorSession, FormState
from rngcalc.cli.shared import render_header, render_result
from rngcalc.config.loader import get_message

# Prompt order for interactive mode
FORM_FIELDS = ('fish_name', 'base_denominator', 'total_luck', 'total_caught')

# Answer that blanks a field; an empty answer keeps the current value
CLEAR_FIELD = "-"


def run_interactive(session: CalculatorSession, milestones: bool) -> int:
    """
    Prompt for the form fields, submit, render, and repeat on request.

    Returns:
        Exit status of the last calculation
    """
    print(get_message("form.edit_hint", clear=CLEAR_FIELD))
    status = 0
    while True:
        try:
            for field_name in FORM_FIELDS:
                current = getattr(session.form, field_name)
                prompt = get_message(f'form.{field_name}')
                suffix = f" [{current}]" if current else ""
                value = input(f"{prompt}{suffix}: ")
                if value.strip() == CLEAR_FIELD:
                    session.set_field(field_name, "")
                elif value or not current:
                    session.set_field(field_name, value)

            result = session.submit()
            print(render_result(result, milestones=milestones))
            status = 0 if result.valid else 1

            again = input(f"\n{get_message('form.again')} ")
        except (EOFError, KeyboardInterrupt):
            print()
            return status

        if again.strip().lower() not in ('y', 'ya', 'yes'):
            return status


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the RNG calculator CLI."""
    parser = argparse.ArgumentParser(
        description="Calculate rare fish drop chances for Fish It (Roblox)"
    )
    parser.add_argument(
        '--name', '-f',
        default='',
        help='Fish name, for display only (optional)'
    )
    parser.add_argument(
        '--base', '-x',
        default='',
        help='Base rate denominator X from "1 : X" (e.g. 1500000)'
    )
    parser.add_argument(
        '--luck', '-l',
        default='',
        help='Total Luck %% (e.g. 0, 50, 120; default: 0)'
    )
    parser.add_argument(
        '--caught', '-n',
        default='',
        help='Total Caught / casts made so far (default: 0)'
    )
    parser.add_argument(
        '--milestones', '-m',
        action='store_true',
        help='Also show casts needed for 50/90/99%% confidence'
    )
    parser.add_argument(
        '--interactive', '-i',
        action='store_true',
        help='Fill the form field by field instead of using flags'
    )

    args = parser.parse_args(argv)

    form = FormState(
        fish_name=args.name,
        base_denominator=args.base,
        total_luck=args.luck,
        total_caught=args.caught,
    )
    session = CalculatorSession(form)

    print(render_header())

    if args.interactive:
        return run_interactive(session, args.milestones)

    if not args.base:
        print("Error: missing --base (base rate 1 : X). Use --interactive to fill the form.", file=sys.stderr)

    result = session.submit()
    print(render_result(result, milestones=args.milestones))
    return 0 if result.valid else 1


if __name__ == '__main__':
    sys.exit(main())

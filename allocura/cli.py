# allocura/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, TextIO

from allocura.config import ROUNDING_MODES
from allocura.exceptions import InvalidProfileField
from allocura.planner.engine import build_portfolio, generate_portfolio
from allocura.planner.profile import UserProfile, monthly_investment_amount, parse_profile, profile_warnings
from allocura.planner.questions import STEPS, STEP_KEYS
from allocura.planner.sip import sip_future_value
from allocura.report.narrator import build_report, render_text

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_PROFILE = 2


def _flag(key: str) -> str:
    # ageGroup -> --age-group, existingEMIs -> --existing-emis
    out = []
    for i, ch in enumerate(key):
        if ch.isupper() and i > 0 and not key[i - 1].isupper():
            out.append("-")
        out.append(ch.lower())
    return "--" + "".join(out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="allocura",
        description="Allocura: questionnaire-based asset allocation (India)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --age-group 26-35 --income-stability stable --existing-emis none \\
                 --emergency-fund strong --investment-horizon long --risk-comfort medium \\
                 --gold-preference no --monthly-investment 5000
  python main.py --answers answers.json --json
  python main.py --interactive -o report.txt
        """,
    )
    for step in STEPS:
        values = [opt.value for opt in step.options if not step.freeForm]
        help_text = step.question
        if values:
            help_text += f" ({' | '.join(values)})"
        parser.add_argument(_flag(step.key), dest=step.key, default=None, help=help_text)

    parser.add_argument("--answers", default=None, help="JSON file with questionnaire answers")
    parser.add_argument("--interactive", action="store_true", help="Ask the questions one by one")
    parser.add_argument("--rounding", choices=list(ROUNDING_MODES), default=None,
                        help="How shares are rounded to whole percentages")
    parser.add_argument("--strict", action="store_true", help="Reject answers outside the option sets")
    parser.add_argument("--json", action="store_true", help="Print the dashboard payload as JSON")
    parser.add_argument("-o", "--output", default=None, help="Write the text report to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _load_answers(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def ask_questions(
    input_fn: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> Dict[str, str]:
    """Walk the questionnaire; accepts an option number or the option value."""
    answers: Dict[str, str] = {}
    for idx, step in enumerate(STEPS, start=1):
        out.write(f"\n[{idx}/{len(STEPS)}] {step.question}\n  {step.subtitle}\n")
        for n, opt in enumerate(step.options, start=1):
            desc = f" - {opt.description}" if opt.description else ""
            out.write(f"  {n}. {opt.label}{desc}\n")
        values = [opt.value for opt in step.options]
        while True:
            raw = input_fn("> ").strip()
            choice = None
            if raw.isdigit() and 1 <= int(raw) <= len(values):
                choice = values[int(raw) - 1]
            elif raw in values or (step.freeForm and raw):
                choice = raw
            if choice == "custom":
                choice = input_fn("  Amount (₹): ").strip()
            if choice:
                answers[step.key] = choice
                break
            out.write("  Please pick one of the options.\n")
    return answers


def collect_answers(
    args: argparse.Namespace,
    input_fn: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> Dict[str, Any]:
    answers: Dict[str, Any] = {}
    if args.answers:
        answers.update(_load_answers(args.answers))
    if args.interactive:
        answers.update(ask_questions(input_fn, out))
    for key in STEP_KEYS:
        value = getattr(args, key, None)
        if value is not None:
            answers[key] = value
    return answers


def run(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input, out: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        answers = collect_answers(args, input_fn, out)
    except (OSError, ValueError) as exc:
        sys.stderr.write(f"Could not read answers: {exc}\n")
        return EXIT_INVALID_PROFILE

    try:
        profile: UserProfile = parse_profile(answers, strict=args.strict)
    except InvalidProfileField as exc:
        sys.stderr.write(f"Invalid answer: {exc}\n")
        return EXIT_INVALID_PROFILE

    for warning in profile_warnings(profile):
        logger.warning(warning)

    if args.json:
        payload = generate_portfolio(profile, rounding=args.rounding)
        out.write(json.dumps(payload, indent=2, ensure_ascii=False) + "\n")
        return EXIT_OK

    allocation, explanations = build_portfolio(profile, rounding=args.rounding)
    amount = monthly_investment_amount(profile)
    sip = None
    if amount is not None:
        try:
            sip = sip_future_value(amount)
        except ValueError as exc:
            logger.warning("SIP projection skipped: %s", exc)

    text = render_text(build_report(profile, allocation, explanations, sip=sip))
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        out.write(f"Report saved -> {args.output}\n")
    else:
        out.write(text)
    return EXIT_OK


def main() -> None:
    sys.exit(run())

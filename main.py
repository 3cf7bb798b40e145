#!/usr/bin/env python3
"""
main.py: Allocura questionnaire-based asset allocation (India)

Usage:
  python main.py --age-group 26-35 --income-stability stable --existing-emis none \
                 --emergency-fund strong --investment-horizon long --risk-comfort medium \
                 --gold-preference no --monthly-investment 5000
  python main.py --interactive
  python main.py --answers answers.json --json --rounding largest_remainder
"""

from allocura.cli import main


if __name__ == "__main__":
    main()

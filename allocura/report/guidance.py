# allocura/report/guidance.py
# Fixed copy shown on the dashboard and in the exported report.

APP_NAME = "Allocura"
TAGLINE = "Your Personalized Investment Portfolio"
FOOTER_LINE = "Allocura - Simple, Sensible Investing for India"
EDUCATIONAL_NOTICE = "For educational purposes only. Consult SEBI-registered advisors before investing."

INVESTMENT_GUIDELINES = (
    "Start with building an emergency fund before aggressive investing",
    "Invest regularly through SIP to benefit from rupee cost averaging",
    "Review and rebalance your portfolio annually",
    "Don't panic during market volatility - stay invested for long term",
    "Consider tax-saving instruments like ELSS for Section 80C benefits",
    "Diversify across asset classes to reduce overall portfolio risk",
)

REMINDERS = (
    {
        "title": "Emergency Fund First",
        "description": "Build 3-6 months of expenses before aggressive investing",
        "color": "hsl(43, 96%, 56%)",
    },
    {
        "title": "Annual Rebalancing",
        "description": "Review and rebalance your portfolio once a year",
        "color": "hsl(173, 58%, 39%)",
    },
    {
        "title": "Low Expense Ratios",
        "description": "Prefer funds with expense ratios below 0.5%",
        "color": "hsl(210, 70%, 55%)",
    },
    {
        "title": "Stay the Course",
        "description": "Avoid panic selling during market downturns",
        "color": "hsl(280, 60%, 55%)",
    },
)

DISCLAIMERS = (
    "This is for educational purposes only and does not constitute financial advice",
    "Past performance does not guarantee future returns",
    "All investments are subject to market risks",
    "Please consult a SEBI-registered investment advisor before investing",
    "The allocation is based on general principles and may not suit your specific needs",
)

SIP_NOTICE = "*This is an estimate. Actual returns may vary based on market conditions."
TRAJECTORY_NOTICE = "*For educational purposes only. Past performance ≠ future returns."

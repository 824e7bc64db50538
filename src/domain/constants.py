"""Domain constants for budget aggregation."""

ACCOUNT_NUMBER_COLUMN = "Account Number"
CATEGORY_COLUMN = "Category"
DEPARTMENT_COLUMN = "Department"
DESCRIPTION_COLUMN = "Description"

DEFAULT_PERIOD_COLUMNS = (
    "FY21 ACTUALS",
    "FY22 ACTUALS",
    "FY23 ACTUALS",
    "FY24 BUDGET",
    "FY25 DEPT REQ.",
)

DEFAULT_PRIOR_PERIOD = "FY24 BUDGET"
DEFAULT_CURRENT_PERIOD = "FY25 DEPT REQ."

NOT_APPLICABLE = "N/A"


__all__ = [
    "ACCOUNT_NUMBER_COLUMN",
    "CATEGORY_COLUMN",
    "DEPARTMENT_COLUMN",
    "DESCRIPTION_COLUMN",
    "DEFAULT_PERIOD_COLUMNS",
    "DEFAULT_PRIOR_PERIOD",
    "DEFAULT_CURRENT_PERIOD",
    "NOT_APPLICABLE",
]

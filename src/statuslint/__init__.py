"""Turn structured validation results into ``file:line:column: message`` lint output."""

__version__ = "0.1.0"

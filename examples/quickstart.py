"""Quickstart example for amountlex.

Parses a column of monetary cells as they come out of payment-app and bank
statement exports: mixed markers, Western and Indian digit grouping, stray
whitespace and the occasional junk cell.
"""

from amountlex import (
    CurrencyCode,
    CurrencyParser,
    is_parseable_amount,
    parse_currencies,
    parse_currency,
    to_canonical,
)

# Example 1: Single cells
print("=" * 50)
print("Example 1: Single Cells")
print("=" * 50)

for cell in ("₹1,234.56", "INR 1,23,456.78", "$1,234,567.89", "₹-100.50", "100.50"):
    amount = parse_currency(cell)
    print(f"{cell!r:>20} -> {amount.value!r} {amount.currency}")
# Output:
#          '₹1,234.56' -> 1234.56 INR
#    'INR 1,23,456.78' -> 123456.78 INR
#    '$1,234,567.89' -> 1234567.89 USD
#         '₹-100.50' -> -100.5 INR
#           '100.50' -> 100.5 INR

# Example 2: Zero vs. fallback
print("\n" + "=" * 50)
print("Example 2: Telling a Real Zero from a Fallback")
print("=" * 50)

for cell in ("₹0.00", "invalid"):
    print(f"{cell!r}: {parse_currency(cell)} parseable={is_parseable_amount(cell)}")
# Output:
# '₹0.00': ParsedAmount(value=0.0, currency=<CurrencyCode.INR: 'INR'>) parseable=True
# 'invalid': ParsedAmount(value=0.0, currency=<CurrencyCode.INR: 'INR'>) parseable=False

# Example 3: A whole column
print("\n" + "=" * 50)
print("Example 3: Batch Parsing")
print("=" * 50)

column = ["₹10,00,000.00", "", "USD 25.00", "n/a", "$ 123.45"]
amounts, fallbacks = parse_currencies(column, max_workers=4)
for amount in amounts:
    print(to_canonical(amount))
for fallback in fallbacks:
    print(f"row {fallback.index} ({fallback.input_value!r}) fell back: {fallback.reason}")
# Output:
# ₹1000000
# ₹0
# $25
# ₹0
# $123.45
# row 1 ('') fell back: empty_input
# row 3 ('n/a') fell back: no_digits

# Example 4: A different default currency
print("\n" + "=" * 50)
print("Example 4: Custom Default Currency")
print("=" * 50)

usd_first = CurrencyParser(default_currency=CurrencyCode.USD)
print(usd_first.parse("100.50"))
# Output: ParsedAmount(value=100.5, currency=<CurrencyCode.USD: 'USD'>)

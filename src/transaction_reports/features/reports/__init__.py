"""Monthly reporting endpoints for product transactions

Statistics, price-range bar chart, category pie chart and the combined
view that renders all of them next to the first page of transactions.
Every report is scoped to one month through the same dateOfSale
substring filter used by the transaction listing; handlers delegate to
service functions that hold the actual logic."""

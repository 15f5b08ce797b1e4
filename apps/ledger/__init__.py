"""
Ledger App - Running Tabs and Purchase History

Every purchase is written twice in one database transaction:

- Transaction: the working ledger of unsettled debt. A user's balance is the
  sum of their rows. Settlement deletes rows, one user or everyone at once.
- PurchaseHistory: the permanent archive. Settlement never touches it.

Both rows carry a frozen copy of product name and price, so catalog edits
never change what was already recorded.
"""

"""
Catalog App - Purchasable Products

Products with a unit price, a reporting category and display hints.
Only an administrator changes the catalog; purchases keep their own copy of
name and price, so catalog edits never rewrite past tabs.
"""

"""Services package — all workflow logic lives here, never in repositories.

Files:
  warehouse.py  — WarehouseManager (seeding, print-all, increase-stock, remove-by-id)
  seed.py       — sample data and CSV/tabular producers
  reporter.py   — text rendering of repository contents

Rule: the manager calls repositories, repositories hold the items.
      Repository failures are translated into reports here and never re-raised.
"""

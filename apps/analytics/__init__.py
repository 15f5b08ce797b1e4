"""Read-only reports: balances, rankings, category mix and monthly history."""

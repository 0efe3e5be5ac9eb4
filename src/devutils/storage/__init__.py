"""Key-value blob storage backing the history ledgers."""

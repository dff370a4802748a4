"""Services — imperative shell around the pure core (database access lives here)."""

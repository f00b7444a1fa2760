"""Services — imperative shell around storage for multi-step workflows."""

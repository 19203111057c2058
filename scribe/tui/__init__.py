"""Tab state, filtering and key handling for the terminal browser of the audit log."""
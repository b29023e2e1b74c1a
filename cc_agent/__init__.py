"""HTTP front-end that forwards a prompt to a Claude agent and returns its text reply."""

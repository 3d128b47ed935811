"""Services for git-prompt-status."""

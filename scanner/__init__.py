"""Self-check scanner that confirms a running lab is still exploitable."""

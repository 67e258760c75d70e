"""skillhook: surface style-guide skills for a user intent and format files after edits."""

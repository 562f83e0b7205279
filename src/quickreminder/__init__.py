"""QuickReminder: a single-screen terminal task list."""

"""Request controllers for the Cedar agent."""

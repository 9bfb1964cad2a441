"""Browser-agnostic helpers shared by the smoke, unit and E2E suites."""

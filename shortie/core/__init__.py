"""Settings, exceptions, validators and other shared building blocks."""

"""Domain layer - formats, probe reports and conversion policy."""

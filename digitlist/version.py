"""0.0.1.2026.1017.0000.00"""
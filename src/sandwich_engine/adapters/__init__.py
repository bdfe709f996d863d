"""Front ends that host the pair engine."""

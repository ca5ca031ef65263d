"""Search orchestration components."""

"""Vote aggregation, ranking and completion tracking for a pizza contest."""

"""Pure grouping logic: digit sets, policies, span location, grouping, rendering."""

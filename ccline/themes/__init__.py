"""Status line colour themes, one module per theme, each with a segments() function."""
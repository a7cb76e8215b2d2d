"""Web reports over analysed job executions."""

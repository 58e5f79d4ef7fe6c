"""modules — planning engine, enrichment, dataset access and observability."""

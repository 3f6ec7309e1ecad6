"""
Extractors for the SPIP database.

This subpackage holds the SQL issued against a SPIP install and the
read-only page index built from the article listing.  Rows are returned
as plain dictionaries keyed by column alias, so the rest of the pipeline
never depends on the driver.
"""

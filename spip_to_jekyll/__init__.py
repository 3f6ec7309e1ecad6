"""
Top-level package for the SPIP → Jekyll import utility.

This package bundles all components required to read articles, authors,
keywords and forum messages from a SPIP MySQL database, turn each article
into a Jekyll document (YAML front matter followed by the original body)
and write a shell script that downloads the site's documents.  Modules
are split into subpackages:

* :mod:`spip_to_jekyll.extractors` – SQL queries and the page index
* :mod:`spip_to_jekyll.parsers` – entity cleaning, slugs and ``<!-- more -->`` handling
* :mod:`spip_to_jekyll.migrators` – Jekyll destination paths and file writing
* :mod:`spip_to_jekyll.models` – option and front matter models
* :mod:`spip_to_jekyll.utils` – event reports, taxonomy sets and the asset script

Each layer has no direct knowledge of configuration or execution
strategy; orchestration is handled in the migration_tool.
"""

"""Tag management for documents of a case indexed in Solr."""

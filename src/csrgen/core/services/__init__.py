"""Application services: resolve the subject, then request the CSR."""

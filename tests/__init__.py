"""
Test suite for Bank Statement Analyzer.

Architecture: Hexagonal (Ports & Adapters)
Testing Strategy:
- Unit tests: parsing helpers, strategies, analyzer and report
- Integration tests: use case wired with real adapters
- API tests: FastAPI app driven in-process through httpx
"""

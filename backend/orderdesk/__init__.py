"""
OrderDesk Backend - Application Package Initializer
=====================================================

What:  Marks the `orderdesk` directory as a Python package.
Who:   Imported by uvicorn, pytest and `python -m orderdesk`.

Architecture Note:
    A thin HTTP facade over a relational store:

    ┌─────────────────────────────────────┐
    │     Routes (static route table)     │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (one statement per call) │  ← Query + error mapping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │      Database (connection pool)     │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

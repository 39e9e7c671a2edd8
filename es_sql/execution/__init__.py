"""Result formatting."""

from es_sql.execution.result_formatter import ResultFormatter

__all__ = ["ResultFormatter"]

"""
Result formatting utilities.

Turns the columnar SQL result set into row records.
"""

from typing import Any, Dict, List, Optional

from es_sql.core.models import Column, SqlQueryResponse


class ResultFormatter:
    """
    Formats SQL query responses into a record-oriented structure.

    Continuation pages carry no columns, so the columns of the first page can
    be passed in explicitly.
    """

    @staticmethod
    def to_records(
        response: SqlQueryResponse, columns: Optional[List[Column]] = None
    ) -> List[Dict[str, Any]]:
        """
        Convert rows into dictionaries keyed by column name.

        Args:
            response: Decoded SQL response
            columns: Columns to use instead of response.columns

        Returns:
            One dictionary per row

        Raises:
            ValueError: If a row does not have one cell per column
        """
        names = [column.name for column in (columns or response.columns)]
        records = []
        for index, row in enumerate(response.rows):
            if len(row) != len(names):
                raise ValueError(
                    f"row {index} has {len(row)} cells, expected {len(names)}"
                )
            records.append(dict(zip(names, row)))
        return records

    @staticmethod
    def format_result(
        response: SqlQueryResponse, columns: Optional[List[Column]] = None
    ) -> Dict[str, Any]:
        """
        Format a response for an API layer.

        Returns:
            Dictionary with columns, records and cursor
        """
        used_columns = columns or response.columns
        formatted: Dict[str, Any] = {
            "columns": [column.model_dump() for column in used_columns],
            "records": ResultFormatter.to_records(response, used_columns),
        }
        if response.cursor:
            formatted["cursor"] = response.cursor
        return formatted

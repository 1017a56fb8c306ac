from lodviz_kernel.adapters.normalize import points_from_xy, table_from_dataframe, table_from_records

__all__ = ["points_from_xy", "table_from_dataframe", "table_from_records"]

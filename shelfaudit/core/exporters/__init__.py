from .codes import CodesExport, export_product_codes, select_issues

__all__ = ["CodesExport", "export_product_codes", "select_issues"]

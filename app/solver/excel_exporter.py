"""
solver/excel_exporter.py

Export solver results to Excel (.xlsx) format.
No UI dependencies. Choosing a destination file is the caller's job.
"""

from datetime import datetime

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill


def _add_metadata_sheet(wb, response, netlist_name=""):
    """Add a Summary sheet with netlist metadata."""
    ws = wb.active
    ws.title = "Summary"
    header_font = Font(bold=True)
    ws.append(["Solver Report Summary"])
    ws["A1"].font = Font(bold=True, size=14)
    ws.append([])
    ws.append(["Date", datetime.now().strftime("%Y-%m-%d %H:%M:%S")])
    if netlist_name:
        ws.append(["Netlist", netlist_name])
    ws.append(["Results", len(response.results)])
    ws.append(["Equations", len(response.equations)])
    if response.superposition_hidden:
        ws.append(["Superposition", "Hidden (dependent sources present)"])
    for row in ws.iter_rows(min_row=3, max_col=1):
        row[0].font = header_font
    ws.column_dimensions["A"].width = 18
    ws.column_dimensions["B"].width = 36
    return ws


def _style_header_row(ws, row_num=1):
    """Apply header styling to the first row of a worksheet."""
    header_fill = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")
    for cell in ws[row_num]:
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center")


def export_to_excel(response, filepath, netlist_name=""):
    """Export a solver response to an Excel workbook.

    Args:
        response: SolverResponse
        filepath: path to write the .xlsx file
        netlist_name: optional netlist filename for metadata
    """
    wb = Workbook()
    _add_metadata_sheet(wb, response, netlist_name)
    _export_results(wb, response)
    _export_equations(wb, response)
    if response.superposition:
        _export_superposition(wb, response)
    if response.meshes:
        _export_meshes(wb, response)
    wb.save(filepath)


def _export_results(wb, response):
    ws = wb.create_sheet("Results")
    ws.append(["Location", "Value", "Unit"])
    _style_header_row(ws)
    for result in response.results:
        ws.append([result.location, result.numeric_value, result.unit])
    ws.column_dimensions["A"].width = 24
    ws.column_dimensions["B"].width = 20


def _export_equations(wb, response):
    ws = wb.create_sheet("Equations")
    ws.append(["#", "Equation"])
    _style_header_row(ws)
    for i, equation in enumerate(response.equations, start=1):
        ws.append([i, equation])
    ws.column_dimensions["B"].width = 60


def _export_superposition(wb, response):
    ws = wb.create_sheet("Superposition")
    ws.append(["Active Source"] + [f"v_{label}" for label in response.node_labels])
    _style_header_row(ws)
    for source, values in response.superposition_by_node():
        ws.append([source] + [str(value) for _, value in values])
    ws.column_dimensions["A"].width = 18


def _export_meshes(wb, response):
    ws = wb.create_sheet("Meshes")
    ws.append(["Mesh", "Description", "Equation"])
    _style_header_row(ws)
    for i, mesh in enumerate(response.meshes, start=1):
        ws.append([i, mesh.description, mesh.equation])
    ws.column_dimensions["B"].width = 30
    ws.column_dimensions["C"].width = 50

"""
solver/csv_exporter.py

Export solver results to CSV format.
No UI dependencies. Choosing a destination file is the caller's job.
"""

import csv
import io
from datetime import datetime


def _write_header(writer, netlist_name):
    writer.writerow(["# Export", "Solver Results"])
    writer.writerow(["# Date", datetime.now().strftime("%Y-%m-%d %H:%M:%S")])
    if netlist_name:
        writer.writerow(["# Netlist", netlist_name])
    writer.writerow([])


def export_solver_results(response, netlist_name=""):
    """
    Export final results (and superposition steps, if any) to a CSV string.

    Args:
        response: SolverResponse
        netlist_name: optional netlist filename or example key

    Returns:
        str: CSV content
    """
    output = io.StringIO()
    writer = csv.writer(output)
    _write_header(writer, netlist_name)

    writer.writerow(["Location", "Value", "Unit"])
    for result in response.results:
        writer.writerow([result.location, result.numeric_value, result.unit])

    steps = response.superposition_by_node()
    if steps:
        writer.writerow([])
        labels = [str(label) for label in response.node_labels]
        writer.writerow(["Active Source"] + [f"v_{label}" for label in labels])
        for source, values in steps:
            writer.writerow([source] + [value for _, value in values])

    return output.getvalue()


def export_equations(response, netlist_name=""):
    """
    Export system and mesh equations to a CSV string.

    Args:
        response: SolverResponse
        netlist_name: optional netlist filename or example key

    Returns:
        str: CSV content
    """
    output = io.StringIO()
    writer = csv.writer(output)
    _write_header(writer, netlist_name)

    writer.writerow(["Kind", "Description", "Equation"])
    for i, equation in enumerate(response.equations, start=1):
        writer.writerow(["System", f"Equation {i}", equation])
    for i, mesh in enumerate(response.meshes or [], start=1):
        writer.writerow(["Mesh", f"Mesh {i}: {mesh.description}", mesh.equation])

    return output.getvalue()

"""
Module: output

Purpose:
    Output generation for genclass. Packages the staged class files into
    a deterministic jar.

Key Functions:
    - write_output_jar(): Write staged files to the output jar
"""

from .jar_writer import write_output_jar, NORMALIZED_TIMESTAMP

__all__ = [
    "write_output_jar",
    "NORMALIZED_TIMESTAMP",
]

"""
The MODEL layer contains pure data structures and geometry helpers.
It has NO knowledge of sampling, random sources or file formats.
"""

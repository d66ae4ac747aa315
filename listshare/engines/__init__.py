"""
Read-side engines that shape records into page data.
"""

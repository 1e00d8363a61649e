"""function families backing the flat loqy api and the enumerable accessors"""

"""Character, conversion, string, memory, linked-list and output helpers."""
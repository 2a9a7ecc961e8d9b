"""JSON save games with typed fields and named arrays."""
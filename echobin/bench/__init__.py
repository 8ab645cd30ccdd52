"""
Latency benchmark of the echo server against an httpbin-compatible service.
"""

"""Typed system attribute registry exposed over a publish/subscribe-and-RPC bus."""

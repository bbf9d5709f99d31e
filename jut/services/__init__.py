"""Token decoding, claim annotation and rendering services"""

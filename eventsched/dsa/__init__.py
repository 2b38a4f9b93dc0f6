"""Slot-assignment algorithms over integer event ids, and a sum segment tree."""
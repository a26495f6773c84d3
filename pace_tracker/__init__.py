"""Personal running-training tracker with VDOT pace zones."""

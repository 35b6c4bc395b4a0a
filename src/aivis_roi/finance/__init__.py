"""Finance layer: payback, net-after-cost and sensitivity sweeps."""

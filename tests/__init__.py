"""The affinematrix test suite."""

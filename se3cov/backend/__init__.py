"""
Backend package for se3cov.

Subpackages:
- operators/: second- and fourth-order compounding kernels

Modules:
- chain: compounding of increment sequences with OpReport
- diagnostics: covariance sanity checks
- config: YAML loading and parameter validation
"""

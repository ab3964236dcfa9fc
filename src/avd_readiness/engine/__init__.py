"""Engine package - Pattern matching and result aggregation.

Import ReadinessAggregator from avd_readiness.engine.aggregator; checks
import the matching helpers from this package, so nothing is re-exported
here.
"""

"""Core domain: entries, histograms and the analyzer."""

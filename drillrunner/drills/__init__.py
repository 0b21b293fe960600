"""Worked answers to the practice exercises: basics, errors, iterators, concurrency."""
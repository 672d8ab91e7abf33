"""Back-office API for a training school: programs, cohorts, learners, staff and admissions."""

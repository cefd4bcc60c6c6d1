"""Mixed workload scenario.

Combines shopping and engagement journeys with weights that model a
small storefront's traffic. This is the recommended scenario for a load
baseline.
"""

from locust import HttpUser, between

from loadtests.scenarios.engagement import DonationJourney, FormSubmissionJourney
from loadtests.scenarios.shopping import (
    BrowseCatalogueJourney,
    CheckoutJourney,
    RetriedCheckoutJourney,
)


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload across the storefront API.

    Shopping (80%):
    - Catalogue browsing: most traffic is read-only
    - Checkout: conversion
    - Retried checkout: dropped responses resubmitted with the same key

    Engagement (20%):
    - Form submissions: contact, volunteering, artisan applications
    - Donations: campaign progress read before and after

    Every request passes through the domain-context middleware, so the
    mix also exercises routing each path to the right domain under load.
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        # Shopping (80%)
        BrowseCatalogueJourney: 10,
        CheckoutJourney: 5,
        RetriedCheckoutJourney: 1,
        # Engagement (20%)
        FormSubmissionJourney: 3,
        DonationJourney: 1,
    }

"""Engagement load test scenarios: form submissions and donations."""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    contact_data,
    donation_data,
    join_artisan_data,
    newsletter_data,
    textile_donation_data,
    volunteer_data,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import SupporterState

_FORMS = [
    ("/api/contact", contact_data),
    ("/api/textile-donation", textile_donation_data),
    ("/api/volunteer", volunteer_data),
    ("/api/join-artisan", join_artisan_data),
    ("/api/newsletter", newsletter_data),
]


class FormSubmissionJourney(SequentialTaskSet):
    """Submit one of the public forms, then subscribe to the newsletter."""

    @task
    def submit_form(self):
        path, generator = random.choice(_FORMS)
        with self.client.post(path, json=generator(), catch_response=True, name=f"POST {path}") as resp:
            if resp.status_code != 201:
                resp.failure(f"Form failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def subscribe(self):
        self.client.post("/api/newsletter", json=newsletter_data(), name="POST /api/newsletter")

    @task
    def done(self):
        self.interrupt()


class DonationJourney(SequentialTaskSet):
    """Read impact -> Donate -> Read impact again.

    The campaign total must not go down between the two reads.
    """

    def on_start(self):
        self.state = SupporterState()

    @task
    def impact_before(self):
        with self.client.get("/api/impact", catch_response=True, name="GET /api/impact") as resp:
            if resp.status_code == 200:
                self.state.raised_before = resp.json()["current_campaign_raised_egp"]
            else:
                resp.failure(f"Impact failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def donate(self):
        payload = donation_data()
        with self.client.post("/api/donate", json=payload, catch_response=True, name="POST /api/donate") as resp:
            if resp.status_code == 201:
                self.state.donated = payload["amount"]
            else:
                resp.failure(f"Donation failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def impact_after(self):
        with self.client.get("/api/impact", catch_response=True, name="GET /api/impact") as resp:
            if resp.status_code != 200:
                resp.failure(f"Impact failed: {resp.status_code}")
            elif resp.json()["current_campaign_raised_egp"] < self.state.raised_before:
                resp.failure("Campaign total went down after a donation")

    @task
    def done(self):
        self.interrupt()


class SupporterUser(HttpUser):
    wait_time = between(2.0, 6.0)
    tasks = {
        FormSubmissionJourney: 3,
        DonationJourney: 1,
    }

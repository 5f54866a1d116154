"""Storefront load test scenarios.

Two stateful journeys: a shopper who fills a cart, checks out and cancels
inside the window, and a browser who only reads their cart and history.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    address_data,
    cart_item_data,
    customer_data,
    product_data,
    shipping_address,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class _RegisteredShopper(SequentialTaskSet):
    """Registers a customer and stocks a few products before the journey starts."""

    product_count = 3

    def on_start(self):
        self.state = ShopperState()

        with self.client.post(
            "/customers", json=customer_data(), catch_response=True, name="POST /customers"
        ) as resp:
            if resp.status_code == 201:
                self.state.customer_id = resp.json()["customerId"]
            else:
                resp.failure(f"Register failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()
                return

        for _ in range(self.product_count):
            with self.client.post(
                "/products", json=product_data(), catch_response=True, name="POST /products"
            ) as resp:
                if resp.status_code == 201:
                    self.state.product_ids.append(resp.json()["productId"])
                else:
                    resp.failure(f"Add product failed: {resp.status_code} — {extract_error_detail(resp)}")


class CheckoutJourney(_RegisteredShopper):
    """Add Address -> Fill Cart -> Save One For Later -> Checkout -> History -> Cancel.

    Exercises cart repricing on every write, the checkout snapshot, and the
    cancellation window check.
    """

    @task
    def add_address(self):
        with self.client.post(
            "/customers/me/addresses",
            json=address_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /customers/me/addresses",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Add address failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def fill_cart(self):
        for product_id in self.state.product_ids:
            with self.client.post(
                "/cart/items",
                json=cart_item_data(product_id),
                headers=self.state.headers,
                catch_response=True,
                name="POST /cart/items",
            ) as resp:
                if resp.status_code == 200:
                    items = resp.json()["items"]
                    if items:
                        self.state.saved_item_id = items[-1]["id"]
                else:
                    resp.failure(f"Add to cart failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def save_for_later(self):
        if not self.state.saved_item_id or len(self.state.product_ids) < 2:
            return
        with self.client.put(
            f"/cart/items/{self.state.saved_item_id}/save-for-later",
            headers=self.state.headers,
            catch_response=True,
            name="PUT /cart/items/{id}/save-for-later",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Save for later failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def checkout(self):
        with self.client.post(
            "/orders",
            json={"address": shipping_address()},
            headers=self.state.headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["order"]["id"]
                self.state.order_count += 1
            else:
                resp.failure(f"Checkout failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def view_history(self):
        with self.client.get(
            "/orders", headers=self.state.headers, catch_response=True, name="GET /orders"
        ) as resp:
            if resp.status_code != 200 or resp.json()["count"] != self.state.order_count:
                resp.failure(f"History mismatch: {resp.status_code} — {resp.text[:200]}")

    @task
    def check_cancellable(self):
        with self.client.get(
            f"/orders/{self.state.order_id}/can-cancel",
            headers=self.state.headers,
            catch_response=True,
            name="GET /orders/{id}/can-cancel",
        ) as resp:
            if resp.status_code != 200 or not resp.json()["canCancel"]:
                resp.failure(f"Fresh order not cancellable: {resp.status_code} — {resp.text[:200]}")

    @task
    def cancel(self):
        with self.client.put(
            f"/orders/{self.state.order_id}/cancel",
            headers=self.state.headers,
            catch_response=True,
            name="PUT /orders/{id}/cancel",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Cancel failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class BrowsingJourney(_RegisteredShopper):
    """Read-heavy: view cart, add one item, view cart again, view history."""

    product_count = 1

    @task
    def view_empty_cart(self):
        self.client.get("/cart", headers=self.state.headers, name="GET /cart")

    @task
    def add_one(self):
        if self.state.product_ids:
            self.client.post(
                "/cart/items",
                json=cart_item_data(self.state.product_ids[0]),
                headers=self.state.headers,
                name="POST /cart/items",
            )

    @task
    def view_cart(self):
        self.client.get("/cart", headers=self.state.headers, name="GET /cart")

    @task
    def view_history(self):
        self.client.get("/orders", headers=self.state.headers, name="GET /orders")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    tasks = [CheckoutJourney]
    wait_time = between(0.5, 2)


class BrowsingUser(HttpUser):
    tasks = [BrowsingJourney]
    wait_time = between(0.2, 1)

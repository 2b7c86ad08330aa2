import logging
import uuid


class TestCorrelationIdMiddleware:
    def test_dish_response_echoes_request_id(self, api_client):
        custom_id = "dish-list-request-123"
        response = api_client.get("/dishes", HTTP_X_REQUEST_ID=custom_id)
        assert response.status_code == 200
        assert response["X-Request-ID"] == custom_id

    def test_order_creation_generates_uuid_request_id(self, api_client):
        payload = {
            "deliverTo": "Rua A, 10",
            "mobileNumber": "555-0100",
            "dishes": [{"dishId": "d1", "quantity": 1}],
        }
        response = api_client.post("/orders", {"data": payload})
        assert response.status_code == 201
        request_id = response["X-Request-ID"]
        assert str(uuid.UUID(request_id, version=4)) == request_id

    def test_error_responses_carry_request_id(self, api_client_with_correlation):
        api_client, cid = api_client_with_correlation
        response = api_client.get("/dishes/missing")
        assert response.status_code == 404
        assert response["X-Request-ID"] == cid

    def test_correlation_id_in_order_logs(self, api_client, make_order, caplog):
        order = make_order()
        custom_id = "order-delete-correlation-456"
        with caplog.at_level(logging.INFO):
            response = api_client.delete(f"/orders/{order.id}", HTTP_X_REQUEST_ID=custom_id)
        assert response.status_code == 204
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_pipeline_rejection_logged(self, api_client, caplog):
        with caplog.at_level(logging.WARNING):
            api_client.post("/dishes", {"data": {}})
        assert any("pipeline.rejected" in record.getMessage() for record in caplog.records)


class TestSensitiveDataMasking:
    def test_mobile_number_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "mobile_number": "(505) 143-3369"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["mobile_number"] == "***MASKED***"

    def test_password_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "order.created", "order_id": "42", "lines": 2}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["order_id"] == "42"
        assert result["lines"] == 2
        assert result["event"] == "order.created"

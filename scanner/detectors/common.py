import requests


def build_form_data(form, payload):
    """Fill every non-submit input of a crawled form with payload."""
    data = {}
    for input_field in form.get("inputs", []):
        if input_field["type"] != "submit":
            data[input_field["name"]] = payload
        else:
            data[input_field["name"]] = input_field["value"]
    return data


def submit_form(form, data, timeout=5):
    action = form.get("action")
    if form.get("method", "get").lower() == "post":
        return requests.post(action, data=data, timeout=timeout)
    return requests.get(action, params=data, timeout=timeout)

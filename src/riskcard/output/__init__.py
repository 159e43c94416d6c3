"""Result encoders — legacy V1 JSON, detailed V2 JSON, rich terminal."""

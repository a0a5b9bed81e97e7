TEST_BUCKET_NAME = "links-test-bucket"
TEST_ACCESS_KEY = "testing"
TEST_SECRET_KEY = "testing"
TEST_ENDPOINT = "s3-external-1.amazonaws.com"

# Keys seeded into the mocked bucket, with their bodies
TEST_OBJECTS = {
    "docs/": b"",
    "docs/2020/summary.txt": b"summary of 2020",
    "docs/my file.txt": b"spaces in the key",
    "docs/report.pdf": b"%PDF-1.4 report",
    "readme.md": b"# readme",
}

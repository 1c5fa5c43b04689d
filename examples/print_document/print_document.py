"""Print a PDF and wait for it to finish."""

import os
import sys
import time

from cloudprint import CloudPrintClient, JobStatus, auth

client = CloudPrintClient()
auth.access_token_from_refresh(
    client,
    os.environ["CLOUDPRINT_CLIENT_ID"],
    os.environ["CLOUDPRINT_CLIENT_SECRET"],
    os.environ["CLOUDPRINT_REFRESH_TOKEN"],
)

printers = client.list_printers()
if not printers:
    sys.exit("No printers registered with this account.")

printer = printers[0]
print(f"Printing on {printer.display_name} ({printer.connection_status})")

with open(sys.argv[1], "rb") as f:
    job_id = client.submit_print_job(printer.id, os.path.basename(sys.argv[1]), f.read(), "application/pdf")

FINAL_STATES = {JobStatus.DONE, JobStatus.ERROR, JobStatus.ABORTED}
# A fresh job can take a moment to show up in the job list
MAX_UNKNOWN_POLLS = 6

unknown_polls = 0
while (status := client.get_job_status(job_id)) not in FINAL_STATES:
    if status == JobStatus.UNKNOWN:
        unknown_polls += 1
        if unknown_polls > MAX_UNKNOWN_POLLS:
            sys.exit(f"Job {job_id} never appeared in the job list.")
    print(f"- {job_id}: {status}")
    time.sleep(5)

print(f"Job {job_id} finished: {status}")

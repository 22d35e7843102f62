"""
Sample client messages for testing.

This module contains booking requests as clients paste them into the popup:
- Labelled booking forms
- Free-form request emails
- Airport runs with pick-up / drop-off lines
- Plain address blocks
"""

# Labelled booking form (one field per line)
LABELLED_BOOKING = """Name: John Smith
Phone: (617) 555-0142
Email: John.Smith@Example.com
Pick-up Location: 10 Ocean Ave, Swansea, MA
Destination: Logan Airport Terminal B
Pickup Date: 03/15/2025
Pickup Time: 5:30 pm
Passengers: 4
Vehicle Type: Stretch Limo
"""

# Free-form request email
FREE_FORM_REQUEST = """Hello,
Please book a ride from 25 Barneyville Road, Swansea, MA on March 3rd, 2025.
Pickup at 4:45 am, 3 passengers.
Call me at 508-555-0199 or email sarah.connor@mail.com
Thanks,
Sarah
"""

# Airport pick-up with a drop-off address
AIRPORT_RUN = """Pick up: Logan International Airport Terminal C
Drop off: 200 Main Street, Fall River, MA 02720
Date: 12/24/2025
"""

# Plain labelled address with ZIP
ADDRESS_WITH_ZIP = "Address: 123 Main St, Anytown, CA 12345"

# Nothing extractable
NO_DATA = "Thanks for your help!"

SAMPLE_MESSAGES = {
    "labelled_booking": LABELLED_BOOKING,
    "free_form_request": FREE_FORM_REQUEST,
    "airport_run": AIRPORT_RUN,
    "address_with_zip": ADDRESS_WITH_ZIP,
    "no_data": NO_DATA,
}

from enum import Enum


class AddressTestConstants(Enum):
    MOCK_ISO_SCHEME = "iso.3166-2"
    MOCK_COUNTRY_CODE = "US"
    MOCK_ADDRESS_LINES = ["123 Main St", "Suite 400"]
    MOCK_ADDRESS_DETAILS_DATA = {
        "address_lines": [{"text": "123 Main St"}, {"text": "Suite 400"}],
        "country": {
            "country_name_code": {"attr_scheme": "iso.3166-2", "text": "US"},
        },
        "locality": {"locality_name": [{"text": "Springfield"}]},
    }

    MOCK_XAL_DATA = {
        "attr_version": "2.0",
        "address_details": [
            {
                "attr_address_type": "Residential",
                "attr_current_status": "Living",
                "attr_usage": "Home",
                "attr_valid_from_date": "2019-01-01",
                "address_lines": [
                    {"attr_type": "Address Line 1", "text": "Flat 3, 12A Archer Street"},
                    {"attr_type": "Address Line 2", "text": "Chatswood NSW 2067"},
                    {"attr_type": "Address Line 3", "text": "Australia"},
                ],
                "country": {
                    "country_name": {"text": "Australia"},
                    "country_name_code": {"attr_scheme": "iso.3166-2", "text": "AU"},
                    "administrative_area": {
                        "attr_type": "State",
                        "administrative_area_name": [
                            {"attr_type": "Abbreviation", "text": "NSW"},
                            {"attr_type": "Full", "text": "New South Wales"},
                        ],
                        "locality": {
                            "attr_type": "City",
                            "locality_name": [{"text": "Sydney"}],
                            "dependent_locality": {
                                "attr_type": "Suburb",
                                "dependent_locality_name": [{"text": "Chatswood"}],
                                "dependent_locality": {
                                    "attr_type": "District",
                                    "attr_connector": "VIA",
                                    "dependent_locality_name": [{"text": "Chatswood West"}],
                                    "dependent_locality_number": [
                                        {"attr_name_number_occurrence": "After", "text": "5"}
                                    ],
                                },
                            },
                            "thoroughfare": {
                                "attr_type": "Street",
                                "thoroughfare_name": "Archer",
                                "thoroughfare_trailing_type": {"text": "Street"},
                                "thoroughfare_number": {
                                    "attr_number_type": "Single",
                                    "text": "12",
                                },
                                "thoroughfare_number_suffix": {"text": "A"},
                                "premise": {
                                    "attr_type": "Building",
                                    "premise_number": {"attr_number_type": "Single", "code": "B1", "text": "12"},
                                    "premise_number_suffix": {"text": "A"},
                                    "premise": {
                                        "attr_premise_dependency": "PREMISE",
                                        "attr_premise_dependency_type": "NEAR",
                                        "premise_name": {"text": "Chatswood Chase"},
                                    },
                                    "sub_premise": [
                                        {
                                            "attr_type": "Floor",
                                            "sub_premise_number": [{"attr_indicator": "TH", "text": "1"}],
                                            "sub_premise": [
                                                {
                                                    "attr_type": "Flat",
                                                    "sub_premise_number": [{"text": "3"}],
                                                    "sub_premise_number_suffix": {
                                                        "attr_number_suffix_separator": "-",
                                                        "text": "B",
                                                    },
                                                }
                                            ],
                                        },
                                        {"attr_type": "Basement", "sub_premise_name": [{"text": "Storage"}]},
                                    ],
                                },
                            },
                            "postal_code": {
                                "postal_code_number": {"text": "2067"},
                            },
                        },
                    },
                },
            },
            {
                "attr_address_type": "Business",
                "attr_valid_to_date": "2018-12-31",
                "locality": {
                    "locality_name": [{"text": "Paris"}],
                    "large_mail_user": {
                        "attr_type": "Airport",
                        "large_mail_user_name": {"text": "Aeroport Charles de Gaulle"},
                        "large_mail_user_identifier": {"attr_indicator": "CEDEX", "text": "1"},
                        "department": {"department_name": {"text": "Fret"}},
                        "building_name": {"attr_type_occurrence": "Before", "text": "Terminal 2"},
                    },
                    "post_box": {
                        "attr_type": "BP",
                        "post_box_number": {"text": "20101"},
                        "postal_code": {"postal_code_number": {"text": "95711"}},
                    },
                    "post_office": {
                        "attr_indicator": "(P.O)",
                        "post_office_name": {"text": "Roissy"},
                        "post_office_number": {"text": "2"},
                    },
                },
            },
            {
                "address_lines": [{"text": "1600 Pennsylvania Ave NW"}],
                "country": {
                    "country_name_code": {"attr_scheme": "iso.3166-2", "text": "US"},
                    "thoroughfare": {
                        "thoroughfare_leading_type": "Avenue",
                        "thoroughfare_name": "Pennsylvania",
                        "thoroughfare_post_direction": {"text": "NW"},
                        "thoroughfare_number_range": {
                            "attr_type": "Even",
                            "thoroughfare_number_from": {"thoroughfare_number": {"text": "1600"}},
                            "thoroughfare_number_to": {"thoroughfare_number": {"text": "1698"}},
                        },
                        "dependent_thoroughfare": {
                            "thoroughfare_name": "Madison",
                            "thoroughfare_pre_direction": {"text": "North"},
                        },
                        "postal_code": {
                            "postal_code_number": {"text": "20500"},
                            "postal_code_number_extension": {
                                "attr_number_extension_separator": "-",
                                "text": "0003",
                            },
                        },
                    },
                },
            },
        ],
    }
